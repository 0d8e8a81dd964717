"""Service layer: business operations over an ``AsyncSession``."""
