"""BDD UI scenarios (pytest-bdd feature files and step definitions)."""
