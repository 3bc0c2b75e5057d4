"""Drill-down selection across subscriptions, resource groups and VMs.

Runs the interactive flow as a fixed linear sequence:

    list subscriptions -> select -> list resource groups -> select
    -> list VMs -> select -> get VM detail

Each query is scoped by the selections made before it. Errors are not
recovered here; they propagate to the CLI, which reports them and exits.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from azfootprint.modules.interaction_handler import InteractionHandler
from azfootprint.resource_browser import (
    ResourceBrowser,
    ResourceGroup,
    Subscription,
    VirtualMachineDetail,
    VirtualMachineSummary,
)

logger = logging.getLogger(__name__)


class DrillDownError(Exception):
    """Raised when the drill-down cannot continue (e.g. nothing to select)."""

    pass


@dataclass(frozen=True)
class DrillDownResult:
    """Everything selected during one run."""

    subscription: Subscription
    resource_group: ResourceGroup
    vm: VirtualMachineSummary
    detail: VirtualMachineDetail


def format_vm_detail(detail: VirtualMachineDetail) -> str:
    """Render the final VM information block."""
    return (
        "\nVM Information:\n"
        f"Name: {detail.name}\n"
        f"Location: {detail.location}\n"
        f"Size: {detail.vm_size or 'unknown'}"
    )


class DrillDownSelector:
    """Walk the user from a subscription down to a single VM.

    Example:
        >>> selector = DrillDownSelector(browser, CLIInteractionHandler())
        >>> result = selector.run()
        >>> result.detail.vm_size
        'Standard_D2s_v3'
    """

    def __init__(self, browser: ResourceBrowser, handler: InteractionHandler):
        self.browser = browser
        self.handler = handler

    def run(self) -> DrillDownResult:
        """Run the full selection and print the VM details.

        Returns:
            DrillDownResult with every selection and the fetched detail

        Raises:
            ResourceBrowserError: If any Azure call fails
            DrillDownError: If a list to choose from is empty
            click.Abort: If the user cancels a prompt
        """
        subscription = self.select_subscription()
        resource_group = self.select_resource_group(subscription)
        vm = self.select_vm(subscription, resource_group)

        detail = self.browser.get_virtual_machine(
            subscription.subscription_id, resource_group.name, vm.name
        )
        self.handler.show_info(format_vm_detail(detail))

        return DrillDownResult(
            subscription=subscription,
            resource_group=resource_group,
            vm=vm,
            detail=detail,
        )

    def select_subscription(self) -> Subscription:
        subscriptions = self.browser.list_subscriptions()
        selected = self._select(
            subscriptions,
            kind="subscriptions",
            header="Available Subscriptions:",
            message="Select a subscription by number",
            label=lambda s: f"{s.display_name} ({s.subscription_id})",
        )
        self.handler.show_info(
            f"Selected subscription: {selected.display_name} ({selected.subscription_id})"
        )
        return selected

    def select_resource_group(self, subscription: Subscription) -> ResourceGroup:
        groups = self.browser.list_resource_groups(subscription.subscription_id)
        selected = self._select(
            groups,
            kind="resource groups",
            header="Available Resource Groups:",
            message="Select a resource group by number",
            label=lambda rg: rg.name,
            scope=f"subscription {subscription.display_name}",
        )
        self.handler.show_info(f"Selected resource group: {selected.name}")
        return selected

    def select_vm(
        self, subscription: Subscription, resource_group: ResourceGroup
    ) -> VirtualMachineSummary:
        vms = self.browser.list_virtual_machines(
            subscription.subscription_id, resource_group.name
        )
        selected = self._select(
            vms,
            kind="VMs",
            header="Available VMs:",
            message="Select a VM by number",
            label=lambda vm: vm.name,
            scope=f"resource group {resource_group.name}",
        )
        self.handler.show_info(f"Selected VM: {selected.name}")
        return selected

    def _select(
        self,
        items: Sequence[Any],
        kind: str,
        header: str,
        message: str,
        label: Callable[[Any], str],
        scope: str | None = None,
    ) -> Any:
        if not items:
            where = f" in {scope}" if scope else ""
            raise DrillDownError(f"No {kind} found{where}")

        logger.debug(f"Prompting for one of {len(items)} {kind}")
        index = self.handler.prompt_choice(message, [label(item) for item in items], header=header)
        return items[index]
