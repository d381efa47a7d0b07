import pytest

from media_purge.base.exceptions import ConfigLoadError
from media_purge.base.rate_limiter import FixedDelayRateLimiter
from media_purge.handlers import ClearFieldAction, DeleteArchiveAction


def test_builds_field_actions(factory, client):
    images = factory.create_action('images')
    videos = factory.create_action('videos')

    assert isinstance(images, ClearFieldAction)
    assert images.field_name == 'Generated Images'
    assert videos.field_name == 'Generated_Videos'
    assert images.client is client


def test_builds_archive_action(factory, archive):
    action = factory.create_action('local')

    assert isinstance(action, DeleteArchiveAction)
    assert action.archive is archive


def test_unknown_action(factory):
    with pytest.raises(ConfigLoadError):
        factory.create_action('thumbnails')


def test_fixed_delay_sleeps_between_calls(monkeypatch):
    slept = []
    monkeypatch.setattr('media_purge.base.rate_limiter.time.sleep', slept.append)

    limiter = FixedDelayRateLimiter()
    limiter.before_next()
    limiter.before_next()

    assert slept == [0.1, 0.1]


def test_registered_type_builds_itself(factory, monkeypatch):
    built = []

    class ThumbnailAction(DeleteArchiveAction):
        @classmethod
        def from_factory(cls, name, definition, factory):
            built.append((name, factory))
            return super().from_factory(name, definition, factory)

    monkeypatch.setitem(factory._action_types, 'delete_thumbnails', ThumbnailAction)
    monkeypatch.setattr(
        'media_purge.factory.ConfigManager.load_action_definitions',
        lambda name: {'type': 'delete_thumbnails', 'label': 'thumbnails'},
    )

    action = factory.create_action('thumbnails')

    assert isinstance(action, ThumbnailAction)
    assert built == [('thumbnails', factory)]
    assert action.label == 'thumbnails'
