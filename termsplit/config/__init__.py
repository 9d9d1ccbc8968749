"""Configuration for termsplit: constants and persisted UI preferences."""
