from tokbox.config.tokbox import TokboxSettings

__all__ = ["TokboxSettings"]
