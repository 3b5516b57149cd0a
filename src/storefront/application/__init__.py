"""
Application Layer - Use cases and service ports.

Orchestrates domain entities, repositories and external services
(payment gateway, email, SMS) for each storefront operation.
"""
