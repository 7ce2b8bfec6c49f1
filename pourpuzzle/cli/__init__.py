# CLI package for Pour Puzzle
"""
Command-line interface for playing the pouring puzzle.

Commands:
    pourpuzzle play   — Play the puzzle interactively (default)
    pourpuzzle show   — Show the starting buckets and targets
"""
