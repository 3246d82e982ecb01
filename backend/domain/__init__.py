"""Domain layer for energy estimation and food recommendations.

Business logic lives here, decoupled from the GraphQL/REST presentation
and from infrastructure wiring.
"""
