from statewalk.dp.layered import LayeredPuzzleSolver, freeze

__all__ = ["LayeredPuzzleSolver", "freeze"]
