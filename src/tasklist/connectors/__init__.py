"""Front ends that render the store and forward user intents."""
