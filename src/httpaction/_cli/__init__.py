from .cli_request import request

cli = request

__all__ = ["cli"]
