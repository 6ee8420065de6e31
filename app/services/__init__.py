"""Link encoding and chat relay services."""
