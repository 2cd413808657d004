"""Scene layers, one per module. Importing a module registers its layer."""
