"""Infrastructure layer: reflection over live classes and raw allocation."""
