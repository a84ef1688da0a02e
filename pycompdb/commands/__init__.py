from pycompdb.commands.generate import generate

__all__ = ["generate"]
