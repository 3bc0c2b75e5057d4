"""Azure resource browsing module.

Thin wrapper over the Azure management SDK clients. Lists subscriptions,
resource groups and virtual machines, and fetches a single VM, returning
plain dataclasses instead of SDK models.

Paged SDK results are drained page by page into a list in arrival order.
Every Azure SDK error is re-raised as ResourceBrowserError. Clients are
created lazily, reused per scope and released by ResourceBrowser.close().
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from azure.core.exceptions import AzureError
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.resource import ResourceManagementClient, SubscriptionClient

logger = logging.getLogger(__name__)


class ResourceBrowserError(Exception):
    """Raised when an Azure management API call fails."""

    pass


@dataclass(frozen=True)
class Subscription:
    """Azure subscription summary."""

    display_name: str
    subscription_id: str

    @classmethod
    def from_sdk(cls, sub: Any) -> "Subscription":
        return cls(display_name=sub.display_name, subscription_id=sub.subscription_id)


@dataclass(frozen=True)
class ResourceGroup:
    """Azure resource group summary."""

    name: str

    @classmethod
    def from_sdk(cls, rg: Any) -> "ResourceGroup":
        return cls(name=rg.name)


@dataclass(frozen=True)
class VirtualMachineSummary:
    """VM entry as returned by the list call."""

    name: str

    @classmethod
    def from_sdk(cls, vm: Any) -> "VirtualMachineSummary":
        return cls(name=vm.name)


@dataclass(frozen=True)
class VirtualMachineDetail:
    """VM details returned by the get call."""

    name: str
    location: str
    vm_size: str | None = None

    @classmethod
    def from_sdk(cls, vm: Any) -> "VirtualMachineDetail":
        hardware_profile = getattr(vm, "hardware_profile", None)
        vm_size = hardware_profile.vm_size if hardware_profile is not None else None
        return cls(name=vm.name, location=vm.location, vm_size=vm_size)


def collect_pages(paged: Any) -> list[Any]:
    """Drain a paged SDK result into one list.

    Pages are fetched one at a time, each depending on the previous page's
    continuation token. Items keep the order the service returned them in.

    Args:
        paged: An azure.core.paging.ItemPaged (anything with by_page())

    Returns:
        Concatenation of all pages in fetch order
    """
    items: list[Any] = []
    page_count = 0
    for page in paged.by_page():
        page_count += 1
        items.extend(page)
    logger.debug(f"Collected {len(items)} items from {page_count} page(s)")
    return items


class ResourceBrowser:
    """Query the Azure management API for the subscription > resource group > VM tree.

    Client factories default to the Azure SDK client classes and can be
    replaced for testing.

    Example:
        >>> browser = ResourceBrowser(DefaultAzureCredential())
        >>> subs = browser.list_subscriptions()
        >>> groups = browser.list_resource_groups(subs[0].subscription_id)
    """

    def __init__(
        self,
        credential: Any,
        subscription_client_factory: Callable[..., Any] = SubscriptionClient,
        resource_client_factory: Callable[..., Any] = ResourceManagementClient,
        compute_client_factory: Callable[..., Any] = ComputeManagementClient,
    ):
        self.credential = credential
        self._subscription_client_factory = subscription_client_factory
        self._resource_client_factory = resource_client_factory
        self._compute_client_factory = compute_client_factory
        self._subscription_client: Any = None
        self._resource_clients: dict[str, Any] = {}
        self._compute_clients: dict[str, Any] = {}

    def list_subscriptions(self) -> list[Subscription]:
        """List all subscriptions visible to the credential.

        Raises:
            ResourceBrowserError: If any page fetch fails
        """
        logger.debug("Listing subscriptions")
        try:
            if self._subscription_client is None:
                self._subscription_client = self._subscription_client_factory(self.credential)
            client = self._subscription_client
            subs = collect_pages(client.subscriptions.list())
        except AzureError as e:
            raise ResourceBrowserError(f"Failed to list subscriptions: {e}") from e
        return [Subscription.from_sdk(sub) for sub in subs]

    def list_resource_groups(self, subscription_id: str) -> list[ResourceGroup]:
        """List resource groups in a subscription.

        Raises:
            ResourceBrowserError: If any page fetch fails
        """
        logger.debug(f"Listing resource groups in subscription {subscription_id}")
        try:
            if subscription_id not in self._resource_clients:
                self._resource_clients[subscription_id] = self._resource_client_factory(
                    self.credential, subscription_id
                )
            client = self._resource_clients[subscription_id]
            groups = collect_pages(client.resource_groups.list())
        except AzureError as e:
            raise ResourceBrowserError(f"Failed to list resource groups: {e}") from e
        return [ResourceGroup.from_sdk(rg) for rg in groups]

    def list_virtual_machines(
        self, subscription_id: str, resource_group: str
    ) -> list[VirtualMachineSummary]:
        """List VMs in a resource group.

        Raises:
            ResourceBrowserError: If any page fetch fails
        """
        logger.debug(f"Listing VMs in {subscription_id}/{resource_group}")
        try:
            client = self._compute_client(subscription_id)
            vms = collect_pages(client.virtual_machines.list(resource_group))
        except AzureError as e:
            raise ResourceBrowserError(f"Failed to list VMs: {e}") from e
        return [VirtualMachineSummary.from_sdk(vm) for vm in vms]

    def get_virtual_machine(
        self, subscription_id: str, resource_group: str, vm_name: str
    ) -> VirtualMachineDetail:
        """Fetch a single VM.

        Raises:
            ResourceBrowserError: If the call fails
        """
        logger.debug(f"Getting VM {vm_name} in {subscription_id}/{resource_group}")
        try:
            client = self._compute_client(subscription_id)
            vm = client.virtual_machines.get(resource_group, vm_name)
        except AzureError as e:
            raise ResourceBrowserError(f"Failed to get VM information: {e}") from e
        return VirtualMachineDetail.from_sdk(vm)

    def _compute_client(self, subscription_id: str) -> Any:
        if subscription_id not in self._compute_clients:
            self._compute_clients[subscription_id] = self._compute_client_factory(
                self.credential, subscription_id
            )
        return self._compute_clients[subscription_id]

    def close(self) -> None:
        """Close every management client created so far.

        The credential is owned by the caller and is not closed here.
        """
        clients = list(self._resource_clients.values()) + list(self._compute_clients.values())
        if self._subscription_client is not None:
            clients.insert(0, self._subscription_client)

        for client in clients:
            client.close()

        self._subscription_client = None
        self._resource_clients.clear()
        self._compute_clients.clear()
