"""carrotfacts - an IRC bot that answers .carrot and .turnip with facts."""

__version__ = "1.0.0"
