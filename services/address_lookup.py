# services/address_lookup.py
"""
Client for the EA address facade microservice

Postcodes are forwarded as-is and the facade's JSON document is returned
untouched. Failures are not translated: connection errors and non-2xx
statuses propagate to the caller.
"""

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

POSTCODE_PATH = '/address-service/v1/addresses/postcode'


class AddressLookupClient:
    """Thin wrapper around the v1 postcode endpoint of the address facade"""

    def __init__(self, base_url: str, client_id: int = 0, key: str = 'client1'):
        self.base_url = base_url.rstrip('/')
        self.client_id = client_id
        self.key = key

    @property
    def postcode_url(self) -> str:
        return f"{self.base_url}{POSTCODE_PATH}"

    def fetch_postcode(self, postcode: str) -> requests.Response:
        """
        Call the facade for a postcode

        Args:
            postcode: Postcode exactly as entered by the user

        Returns:
            The facade's successful response, body not yet read
        """
        params = {
            'client-id': self.client_id,
            'key': self.key,
            'query-string': postcode,
        }

        logger.info(f"Looking up postcode '{postcode}' via {self.postcode_url}")
        response = requests.get(self.postcode_url, params=params)
        response.raise_for_status()

        return response

    def find_by_postcode(self, postcode: str) -> Any:
        """Decoded JSON body of the facade's answer for a postcode"""
        return self.fetch_postcode(postcode).json()
