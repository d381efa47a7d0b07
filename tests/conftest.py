import logging
from unittest.mock import Mock

import pytest
import requests

from media_purge.base.rate_limiter import NoDelayRateLimiter, RateLimiter
from media_purge.factory import ActionFactory
from media_purge.services.archive_manager import ArchiveManager
from media_purge.services.config_manager import AppConfig
from media_purge.services.record_client import RecordClient


def make_response(status=200, payload=None, text=''):
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.ok = status < 400
    response.text = text
    response.json.return_value = payload if payload is not None else {}
    return response


def make_record(record_id, field='Generated Images', count=1, prompt='a red fox in the snow'):
    fields = {field: [{'url': f'https://dl.airtable.com/{record_id}/{i}.png'} for i in range(count)]}
    if prompt is not None:
        fields['Prompt'] = prompt
    return {'id': record_id, 'fields': fields}


class ScriptedInput:
    """input() replacement that replays answers and remembers the prompts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=''):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class CountingRateLimiter(RateLimiter):

    def __init__(self):
        self.calls = 0

    def before_next(self):
        self.calls += 1


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(base_id='appTEST', token='patTEST', downloads_dir=tmp_path / 'downloads')


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(payload={'records': []})
    session.patch.return_value = make_response(payload={'id': 'rec', 'fields': {}})
    return session


@pytest.fixture
def client(app_config, session):
    return RecordClient(app_config, session=session)


@pytest.fixture
def archive(app_config):
    return ArchiveManager(app_config.downloads_dir)


@pytest.fixture
def factory(client, archive):
    return ActionFactory(client, archive, rate_limiter=NoDelayRateLimiter())


@pytest.fixture(autouse=True)
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog
