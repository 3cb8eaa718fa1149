"""Docker Demo Application web service package."""
