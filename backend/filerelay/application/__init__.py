"""Application services orchestrating registration, retrieval and intake."""
