"""Network helpers for `mealplan serve`."""
import socket


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    Connecting a UDP socket only asks the OS which interface it would pick;
    nothing is sent on the wire.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(host: str, port: int) -> list:
    """URLs to print at startup; a wildcard bind also lists the LAN address."""
    if host not in ("0.0.0.0", "::"):
        return [f"http://{host}:{port}"]
    urls = [f"http://localhost:{port}"]
    local_ip = get_local_ip()
    if local_ip not in ("127.0.0.1", "localhost"):
        urls.append(f"http://{local_ip}:{port}")
    return urls
