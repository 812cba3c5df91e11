"""
Pytest configuration for unit tests.

Provides fixtures that apply to all unit tests.
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """
    Keep the developer's environment out of unit tests.

    This prevents unit tests from:
    - Picking up TRANSMISSION_* variables from the shell
    - Reading a .env file from the working directory
    """
    for name in ('HOST', 'PORT', 'PATH', 'USERNAME', 'PASSWORD'):
        monkeypatch.delenv(f'TRANSMISSION_{name}', raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def rss_document():
    """Small torrent feed with two enclosures and one unrelated element."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss version="2.0">\n'
        '  <channel>\n'
        '    <title>Example tracker</title>\n'
        '    <item>\n'
        '      <title>First</title>\n'
        '      <enclosure url="http://a/1.torrent" type="application/x-bittorrent"/>\n'
        '    </item>\n'
        '    <item>\n'
        '      <title>Second</title>\n'
        '      <enclosure url="http://a/2.torrent" type="application/x-bittorrent"/>\n'
        '    </item>\n'
        '    <image url="http://a/logo.png"/>\n'
        '  </channel>\n'
        '</rss>\n'
    )


@pytest.fixture
def config_data():
    """Valid configuration mapping as it comes out of the YAML loader."""
    return {
        'transmission-rpc': {
            'host': 'nas.local',
            'port': 9091,
            'path': 'transmission/rpc',
            'username': 'admin',
            'password': 'secret',
        },
        'rss': [
            {'url': 'http://feeds.example/one.xml', 'parser': 'enclosure'},
            {'url': 'http://feeds.example/two.xml', 'parser': 'item'},
        ],
        'parser': {
            'enclosure': {'path': 'rss,channel,item,enclosure', 'property': 'url'},
            'item': {'path': 'rss,channel,item', 'property': 'url'},
        },
    }
