"""
Bluetooth devices that can receive WiFi credentials.

The list is closed: any other device name fails form validation.
"""

DEVICES: tuple[str, ...] = (
    "RPi",
    "My Laptop",
    "Smart TV",
    "Bluetooth Speaker",
)


def is_known_device(name: str) -> bool:
    """Check if a device name is one of the selectable devices.

    Args:
        name: Device name exactly as shown in the select box

    Returns:
        True if the device can be selected
    """
    return name in DEVICES
