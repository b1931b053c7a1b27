"""GraphQL document walking."""

from .executor import MISSING, Resolver, ResultMapper, execute, identity_mapper

__all__ = ["MISSING", "Resolver", "ResultMapper", "execute", "identity_mapper"]
