"""Domain records shared by the services and the API layer."""
