import cython


def cython_compiled() -> bool:
    """Check whether the authcode.lib modules run as compiled extensions."""
    return cython.compiled
