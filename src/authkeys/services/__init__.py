"""Services: validation and construction of API key records."""
