from rgsnapshot.utils.decorators import traced

__all__ = [
    "traced",
]
