"""Step definitions binding feature phrases to page objects."""
