from .base import NO_RESPONSE, BaseAsyncLLM
from .openai import LMStudioLLM, LMStudioRequestAdapter

__all__ = ["BaseAsyncLLM", "LMStudioLLM", "LMStudioRequestAdapter", "NO_RESPONSE"]
