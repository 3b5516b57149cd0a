"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain and application
interfaces: JSON file storage, the Paystack client, SMTP email and
Twilio SMS senders.
"""
