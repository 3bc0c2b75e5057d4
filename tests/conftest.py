"""
Shared test fixtures and configuration for azfootprint tests.

This module provides common fixtures used across all test types:
- Isolation from the real ~/.azfootprint/config.toml
- Fake Azure SDK paged results and models
- A ResourceBrowser mock populated with a small resource tree
"""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from azfootprint.config_manager import ConfigManager
from azfootprint.resource_browser import (
    ResourceBrowser,
    ResourceGroup,
    Subscription,
    VirtualMachineDetail,
    VirtualMachineSummary,
)

# ============================================================================
# CONFIG ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the default config file at an empty temp directory.

    Tests must never read the developer's real config.
    """
    config_dir = tmp_path / ".azfootprint"
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_DIR", config_dir)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_FILE", config_dir / "config.toml")
    return config_dir


# ============================================================================
# AZURE SDK FAKES
# ============================================================================


def make_paged(*pages, error=None):
    """Build a fake ItemPaged yielding the given pages, then raising error if set."""

    def by_page():
        for page in pages:
            yield iter(page)
        if error is not None:
            raise error

    paged = Mock()
    paged.by_page.side_effect = by_page
    return paged


@pytest.fixture
def paged():
    """Factory fixture: paged(page1, page2, ..., error=None) -> fake ItemPaged."""
    return make_paged


@pytest.fixture
def sdk_vm():
    """Factory fixture for SDK-shaped VirtualMachine objects."""

    def _make(name, location, vm_size):
        return SimpleNamespace(
            name=name,
            location=location,
            hardware_profile=SimpleNamespace(vm_size=vm_size),
        )

    return _make


# ============================================================================
# BROWSER FIXTURES
# ============================================================================


@pytest.fixture
def fake_browser():
    """ResourceBrowser mock with two subscriptions, one group and one VM."""
    browser = Mock(spec=ResourceBrowser)
    browser.list_subscriptions.return_value = [
        Subscription(display_name="Prod", subscription_id="sub-1"),
        Subscription(display_name="Dev", subscription_id="sub-2"),
    ]
    browser.list_resource_groups.return_value = [ResourceGroup(name="rg-a")]
    browser.list_virtual_machines.return_value = [VirtualMachineSummary(name="vm-x")]
    browser.get_virtual_machine.return_value = VirtualMachineDetail(
        name="vm-x", location="eastus", vm_size="Standard_D2s_v3"
    )
    return browser
