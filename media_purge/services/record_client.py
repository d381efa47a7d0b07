"""Airtable client for generation records."""
from typing import Dict, List, Optional
import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..base.exceptions import RemoteMutationError, RemoteQueryError
from ..models.record import Record
from .config_manager import AppConfig

logger = logging.getLogger(__name__)


class RecordClient:
    """Reads and clears media fields on the generation table.

    Queries return a single page of at most ``config.page_size`` records.
    Records beyond that page are not fetched; a warning is logged when the
    page comes back full so the action can be run again.
    """

    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or self._build_session()

    @staticmethod
    def _build_session() -> requests.Session:
        """One pooled session; failed calls are reported, never replayed."""
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(total=0), pool_connections=1, pool_maxsize=1)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def close(self) -> None:
        self.session.close()

    @property
    def table_url(self) -> str:
        return f"{self.config.api_url}/{self.config.base_id}/{self.config.table}"

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {'Authorization': f"Bearer {self.config.token}"}
        if json_body:
            headers['Content-Type'] = 'application/json'
        return headers

    def fetch_records_with_non_empty_field(self, field_name: str,
                                           prompt_field_name: Optional[str] = None) -> List[Record]:
        """Fetch records whose ``field_name`` is not blank."""
        prompt_field = prompt_field_name or self.config.prompt_field
        params = {
            'filterByFormula': f"NOT({{{field_name}}}=BLANK())",
            'fields[]': [field_name, prompt_field],
            'maxRecords': self.config.page_size,
        }

        try:
            response = self.session.get(
                self.table_url,
                params=params,
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise RemoteQueryError(None, str(e)) from e

        if not response.ok:
            raise RemoteQueryError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteQueryError(response.status_code, f"Invalid JSON response: {e}") from e

        records = [Record.from_api(item, prompt_field) for item in payload.get('records') or []]

        if len(records) >= self.config.page_size:
            logger.warning(
                f"⚠️  Query returned the maximum of {self.config.page_size} records; "
                f"more records with '{field_name}' may exist. Run the action again to clear them."
            )

        logger.debug(f"Fetched {len(records)} records with '{field_name}'")
        return records

    def clear_field(self, record_id: str, field_name: str) -> Dict:
        """Set ``field_name`` to an empty list on one record."""
        try:
            response = self.session.patch(
                f"{self.table_url}/{record_id}",
                json={'fields': {field_name: []}},
                headers=self._headers(json_body=True),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise RemoteMutationError(record_id, None, str(e)) from e

        if not response.ok:
            raise RemoteMutationError(record_id, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteMutationError(
                record_id, response.status_code, f"Invalid JSON response: {e}"
            ) from e
