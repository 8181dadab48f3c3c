"""Date store service: available/occupied date collections over one JSON file."""
