"""Module with the API utility functions."""

from fastapi import HTTPException, Request


def get_ip_address_or_raise(fastapi_request: Request) -> str:
    """
    Get an IP address of the client sending the request raising an exception if missing.

    Args:
        fastapi_request (Request): The request of the client.

    Raises:
        HTTPException: Raised if an IP address cannot be retrieved from the request.

    Returns:
        str: IP address of the client.
    """
    ip = fastapi_request.headers.get("X-Forwarded-For")
    if ip:
        return ip.split(",")[0].strip()
    if fastapi_request.client is None:
        raise HTTPException(
            detail=(
                "Unable to identify the IP address. Please, do not use proxy while "
                "connecting to this API."
            ),
            status_code=401,
        )
    return fastapi_request.client.host
