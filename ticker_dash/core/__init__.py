"""Core package: domain models, errors and the stock API client."""
