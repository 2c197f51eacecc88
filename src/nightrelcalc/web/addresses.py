"""Listen addresses for the web surface."""

import socket


def local_ipv4_addresses() -> list[str]:
    """Non-loopback IPv4 addresses of this host, sorted and de-duplicated."""
    addresses = set()
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except socket.gaierror:
        infos = []
    for info in infos:
        addresses.add(info[4][0])

    # The default-route address is missing from getaddrinfo on some hosts.
    # Connecting a UDP socket sends no packets.
    udp = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        udp.connect(("192.0.2.1", 80))
        addresses.add(udp.getsockname()[0])
    except OSError:
        pass
    finally:
        udp.close()

    return sorted(a for a in addresses if not a.startswith("127."))


def listen_urls(port: int) -> list[str]:
    """URLs the web UI is reachable on, loopback first."""
    urls = [f"http://127.0.0.1:{port}/"]
    urls.extend(f"http://{address}:{port}/" for address in local_ipv4_addresses())
    return urls


def print_listen_addresses(port: int) -> None:
    print("Listening on:")
    for url in listen_urls(port):
        print(f"  {url}")
    print()
