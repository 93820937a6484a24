"""Task tracker: task validation, querying and statistics behind a FastAPI app."""
