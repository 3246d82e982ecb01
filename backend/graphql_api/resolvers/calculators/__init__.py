"""Energy calculator GraphQL resolvers."""

from graphql_api.resolvers.calculators.queries import CalculatorQueries

__all__ = ["CalculatorQueries"]
