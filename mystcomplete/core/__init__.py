"""Context classification, resolvers and configuration."""
