# CapabilityApi/DeviceCapabilities/controller.py

import asyncio
import os
import requests
from typing import Any, Dict, List, Optional, Sequence, Union
from . import queries
from .dedupe import dedupe_by_id
from .errors import ApiError
from .models import (
    Band, CapabilityResult, Combo, Device, DeviceDetail, Feature, NormalizedBand, Provider, Response,
)
from .normalizer import group_bands
from .policy import filter_by_technologies, single_technology
from .selector import CapabilityKind, select_capability_query, tag_support_status
import logging

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:3000/graphql"
DEFAULT_SEARCH_LIMIT = 20


class Controller:
    def __init__(self, endpoint: Optional[str] = None, timeout: int = 10):
        """
        Sets up the controller for the capability GraphQL backend.

        Args:
            endpoint (str, optional): GraphQL URL. Defaults to $RFCAPS_GRAPHQL_ENDPOINT,
                then http://localhost:3000/graphql.
            timeout (int, optional): Timeout for HTTP requests in seconds. Defaults to 10.
        """
        self.endpoint = endpoint or os.environ.get("RFCAPS_GRAPHQL_ENDPOINT", DEFAULT_ENDPOINT)
        self.timeout = timeout
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def execute(self, operation: str, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Posts one GraphQL operation and returns its data payload.

        The blocking request runs in the loop's default executor, so this is
        the only point where callers suspend. Nothing is retried.

        Returns:
            Dict[str, Any]: The "data" member of the response.

        Raises:
            requests.exceptions.RequestException: Transport or HTTP status failure.
            ApiError: The backend answered with GraphQL errors.
        """
        payload = {"query": query, "variables": variables or {}, "operationName": operation}
        logger.info(f"Request {operation}: {self.endpoint}")
        logger.debug(f"Variables: {payload['variables']}")

        try:
            request_func = lambda: requests.post(
                self.endpoint, json=payload, headers=self.headers, timeout=self.timeout
            )

            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(None, request_func)

            if response.status_code != 200:
                logger.error(f"HTTP Error: {response.status_code} - {response.text}")
                response.raise_for_status()

            response_json = response.json()
            logger.debug(f"Response JSON: {response_json}")

        except requests.exceptions.RequestException as e:
            logger.error(f"Request Exception: {e}")
            raise

        api_response = self.parse_api_response(response_json)

        if api_response.errors:
            for error in api_response.errors:
                extensions = error.extensions or {}
                if extensions.get("code") == "RATE_LIMIT_EXCEEDED":
                    logger.warning(f"Rate limited. Retry in {extensions.get('resetIn')} seconds.")
                else:
                    logger.error(f"GraphQL Error in {operation}: {error.message} (path: {error.path})")
            raise ApiError(api_response.errors, operation)

        return api_response.data or {}

    def parse_api_response(self, response: Dict) -> Response:
        """
        Parses the GraphQL envelope into a Response.

        Args:
            response (Dict): Decoded JSON body.

        Returns:
            Response: Parsed envelope.
        """
        try:
            return Response(**response)
        except Exception as e:
            logger.error(f"Failed to parse API response: {e}")
            raise

    async def getDevicesByCapability(
        self,
        kind: Union[CapabilityKind, str],
        capability_id: str,
        provider_id: Optional[str] = None,
        technology: Optional[str] = None,
    ) -> List[CapabilityResult]:
        """
        Lists every device supporting a band, combo or feature.

        Args:
            kind: band, combo or feature.
            capability_id (str): Id of the band, combo or feature.
            provider_id (str, optional): Restrict to support on one provider.
            technology (str, optional): Technology filter passed to the backend.

        Returns:
            List[CapabilityResult]: Rows tagged GLOBAL, or PROVIDER_SPECIFIC when provider_id is set.
        """
        descriptor = select_capability_query(kind, capability_id, provider_id, technology)
        data = await self.execute(descriptor.operationName, descriptor.query, descriptor.variables)
        results = tag_support_status(data.get(descriptor.resultField), provider_id)
        logger.info(f"Found {len(results)} devices for {descriptor.kind.value} {capability_id}.")
        return results

    async def searchDevices(self, term: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[Device]:
        """Vendor-or-model substring search; a device matching both comes back once."""
        term = (term or "").strip()
        if not term:
            return []

        data = await self.execute(
            "SearchDevices",
            queries.SEARCH_DEVICES,
            {"vendor": term, "modelNum": term, "limit": limit},
        )
        devices = dedupe_by_id(Device(**row) for row in data.get("devices") or [])
        logger.info(f"Search '{term}' matched {len(devices)} devices.")
        return devices

    async def getDevice(self, device_id: str) -> Optional[Device]:
        data = await self.execute("GetDevice", queries.GET_DEVICE, {"id": device_id})
        device = data.get("device")
        return Device(**device) if device else None

    async def getDeviceComplete(
        self,
        device_id: str,
        provider_id: Optional[str] = None,
        technologies: Optional[Sequence[str]] = None,
    ) -> Optional[DeviceDetail]:
        """
        Fetches a device with its software, bands, combos and features.

        With provider_id the provider-scoped band and combo lists are used.
        A single selected technology is also sent to the backend; any
        selection is applied locally to bands and combos.

        Returns:
            Optional[DeviceDetail]: None when the device does not exist.
        """
        technology = single_technology(technologies)
        variables: Dict[str, Any] = {
            "id": device_id,
            "bandTechnology": technology,
            "comboTechnology": technology,
        }
        if provider_id:
            variables["providerId"] = provider_id
            data = await self.execute(
                "GetProviderDeviceComplete", queries.GET_PROVIDER_DEVICE_COMPLETE, variables
            )
        else:
            data = await self.execute("GetDeviceComplete", queries.GET_DEVICE_COMPLETE, variables)

        device = data.get("device")
        if not device:
            logger.info(f"Device {device_id} not found.")
            return None

        detail = DeviceDetail.model_validate(device)
        return detail.model_copy(
            update={
                "supportedBands": filter_by_technologies(detail.supportedBands, technologies),
                "supportedCombos": filter_by_technologies(detail.supportedCombos, technologies),
            }
        )

    async def getDeviceBands(
        self,
        device_id: str,
        provider_id: Optional[str] = None,
        technologies: Optional[Sequence[str]] = None,
    ) -> List[NormalizedBand]:
        detail = await self.getDeviceComplete(device_id, provider_id, technologies)
        if detail is None:
            return []
        return group_bands(detail.supportedBands)

    async def getProviders(self) -> List[Provider]:
        data = await self.execute("GetProviders", queries.GET_PROVIDERS)
        return [Provider(**row) for row in data.get("providers") or []]

    async def searchBands(self, technology: Optional[str] = None, band_number: Optional[str] = None) -> List[Band]:
        data = await self.execute(
            "SearchBands",
            queries.SEARCH_BANDS,
            {"technology": technology or None, "bandNumber": band_number or None},
        )
        return [Band(**row) for row in data.get("bands") or []]

    async def searchCombos(self, technology: Optional[str] = None, name: Optional[str] = None) -> List[Combo]:
        data = await self.execute(
            "SearchCombos",
            queries.SEARCH_COMBOS,
            {"technology": technology or None, "name": name or None},
        )
        return [Combo(**row) for row in data.get("combos") or []]

    async def searchFeatures(self, name: Optional[str] = None) -> List[Feature]:
        data = await self.execute("SearchFeatures", queries.SEARCH_FEATURES, {"name": name or None})
        return [Feature(**row) for row in data.get("features") or []]
