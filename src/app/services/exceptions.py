class ExternalServiceError(Exception):
    """Raised by collaborator adapters when the remote call fails"""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service}: {message}")
