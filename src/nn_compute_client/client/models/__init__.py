"""Package containing the tensor and request models for the compute client.

This package contains the data models used to describe inference requests
before they are serialized and handed to a compute backend.
"""

from .tensor_model import InferencePayload, InputTensor, OutputTensor, Tensor

__all__ = ["InferencePayload", "InputTensor", "OutputTensor", "Tensor"]
