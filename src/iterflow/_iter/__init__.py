from ._main import Iter, Seq

__all__ = ["Iter", "Seq"]
