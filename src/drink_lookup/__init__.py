"""
Drink Lookup Service.

Serverless handler that returns the stored image key for a bar's drink:

- handlers: Lambda entry point and response mapping
- logic: request validation and lookup flow
- dal: DynamoDB data access
- models: request, response and record models
"""

__version__ = "1.0.0"
