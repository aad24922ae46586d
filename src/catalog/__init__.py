"""Product catalog persistence layer.

Entities, table models and repositories for products and the categories,
users and images they reference, plus the runtime configuration, logging
and database session plumbing they need.
"""

__version__ = "0.1.0"
