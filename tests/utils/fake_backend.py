from nn_compute_client.compute_wrappers.base import ComputeBackend


class RecordingBackend(ComputeBackend):
    def __init__(self, status: int = 0) -> None:
        self.status: int = status
        self.requests: list[bytes] = []
        self.closed: bool = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def invoke(self, request: bytes) -> int:
        self.requests.append(bytes(request))
        return self.status

    def close(self) -> None:
        self.closed = True
