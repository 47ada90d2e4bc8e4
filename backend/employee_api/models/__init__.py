# Models package init
"""ORM models. Importing a module here registers its table on Base.metadata."""
