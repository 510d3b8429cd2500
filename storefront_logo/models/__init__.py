from storefront_logo.models.logo import Logo

__all__ = [
    "Logo",
]
