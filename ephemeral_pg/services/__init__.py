"""Services for ephemeral-pg."""
