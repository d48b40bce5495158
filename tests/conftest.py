from unittest import mock
from xml.etree.ElementTree import fromstring

import pytest

from delicious.services import PostService


@pytest.fixture
def service():
    return mock.Mock(spec=PostService)


@pytest.fixture
def post_element():
    return fromstring(
        '<post href="http://www.zend.com/" description="Zend Technologies"'
        ' extended="PHP company" hash="9a6fcd1a1c2d2e7b5c2a6b3e4f5a6b7c"'
        ' others="42" tag="php zend framework" time="2005-11-29T01:35:10Z"'
        ' shared="no" />'
    )


@pytest.fixture
def values():
    return {
        'url': 'http://example.com/',
        'title': 'Example',
    }
