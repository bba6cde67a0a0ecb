"""cogsym/core — Types, configuration, errors, validation and registry."""
