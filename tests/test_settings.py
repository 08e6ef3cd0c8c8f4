import pytest

from tuitioncentre.connector.settings import SessionOption, Settings


def test_get_missing_is_none():
    settings = Settings()
    assert settings.get(SessionOption.HOST) is None
    assert settings.has_option(SessionOption.HOST) is False


def test_get_returns_last_value():
    settings = Settings()
    settings.add(SessionOption.HOST, "a.example.com")
    settings.add(SessionOption.HOST, "b.example.com")
    assert settings.get(SessionOption.HOST) == "b.example.com"
    assert settings.host_count == 2
    assert settings.tcpip is True


def test_iteration_keeps_order():
    settings = Settings()
    settings.add(SessionOption.HOST, "h")
    settings.add(SessionOption.PORT, 33060)
    settings.add(SessionOption.HOST, "g")
    assert list(settings) == [
        (SessionOption.HOST, "h"),
        (SessionOption.PORT, 33060),
        (SessionOption.HOST, "g"),
    ]


def test_erase_host_resets_tcpip():
    settings = Settings()
    settings.add(SessionOption.HOST, "h")
    settings.add(SessionOption.PORT, 1)
    settings.erase(SessionOption.HOST)
    assert settings.host_count == 0
    assert settings.tcpip is False
    assert settings.has_option(SessionOption.HOST) is False
    assert settings.get(SessionOption.PORT) == 1


def test_erase_port_keeps_tcpip_with_hosts():
    settings = Settings()
    settings.add(SessionOption.HOST, "h")
    settings.add(SessionOption.PORT, 1)
    settings.erase(SessionOption.PORT)
    assert settings.tcpip is True
    assert settings.has_option(SessionOption.PORT) is False


def test_erase_port_without_hosts_clears_tcpip():
    settings = Settings()
    settings.add(SessionOption.PORT, 1)
    assert settings.tcpip is True
    settings.erase(SessionOption.PORT)
    assert settings.tcpip is False


@pytest.mark.parametrize(
    "option, attr",
    [
        (SessionOption.SOCKET, "socket"),
        (SessionOption.PRIORITY, "user_priorities"),
        (SessionOption.SSL_CA, "ssl_ca"),
    ],
)
def test_flags_set_and_erased(option, attr):
    settings = Settings()
    settings.add(option, "x")
    assert getattr(settings, attr) is True
    settings.erase(option)
    assert getattr(settings, attr) is False


def test_ssl_mode_tracked():
    settings = Settings()
    settings.add(SessionOption.SSL_MODE, "REQUIRED")
    assert settings.ssl_mode == "REQUIRED"
    settings.erase(SessionOption.SSL_MODE)
    assert settings.ssl_mode is None


def test_empty_list_option_counts_as_set():
    settings = Settings()
    settings.add(SessionOption.TLS_VERSIONS, [])
    assert settings.has_option(SessionOption.TLS_VERSIONS) is True
    assert list(settings) == []
    assert settings.has_option(SessionOption.TLS_CIPHERSUITES) is False


def test_list_option_elements_stored_separately():
    settings = Settings()
    settings.add(SessionOption.COMPRESSION_ALGORITHMS, ["zstd", "lz4"])
    assert list(settings) == [
        (SessionOption.COMPRESSION_ALGORITHMS, "zstd"),
        (SessionOption.COMPRESSION_ALGORITHMS, "lz4"),
    ]
    assert settings.get(SessionOption.COMPRESSION_ALGORITHMS) == "lz4"


def test_connection_attributes_cleared_on_erase():
    settings = Settings()
    settings.add(SessionOption.CONNECTION_ATTRIBUTES, {"app": "centre"})
    assert settings.connection_attributes == {"app": "centre"}
    settings.erase(SessionOption.CONNECTION_ATTRIBUTES)
    assert settings.connection_attributes == {}


def test_clear_removes_everything():
    settings = Settings()
    settings.add(SessionOption.HOST, "h")
    settings.add(SessionOption.TLS_VERSIONS, [])
    settings.clear()
    assert list(settings) == []
    assert settings.tcpip is False
    assert settings.has_option(SessionOption.TLS_VERSIONS) is False


def test_unknown_option_rejected():
    with pytest.raises(ValueError):
        Settings().add("bogus", 1)