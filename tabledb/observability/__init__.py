from .instrumentation import Instrumentation, NoOpInstrumentation

__all__ = ["Instrumentation", "NoOpInstrumentation"]
