"""Well-known service labels, used only to annotate open ports."""

SERVICE_TABLE: dict[int, str] = {
    20: "FTP Data",
    21: "FTP Control",
    22: "SSH",
    23: "Telnet",
    25: "SMTP",
    53: "DNS",
    80: "HTTP",
    110: "POP3",
    143: "IMAP",
    443: "HTTPS",
    445: "SMB",
    3306: "MySQL",
    3389: "RDP",
    5432: "PostgreSQL",
    6379: "Redis",
    8080: "HTTP Alt",
    8443: "HTTPS Alt",
    27017: "MongoDB",
}

# FTP, Telnet, SMB, RDP
SENSITIVE_PORTS = frozenset({21, 23, 445, 3389})


def service_name(port: int) -> str:
    return SERVICE_TABLE.get(port, "Unknown")
