"""Domain layer: password rules and the services that compose them."""
