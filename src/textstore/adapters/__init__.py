"""Host integrations for textstore."""
