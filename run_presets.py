#!/usr/bin/env python3
"""
🎯 Preset Checkout Load Scenarios
=================================
Pre-configured runs from a single smoke iteration up to a flash crowd.

Usage:
    python run_presets.py https://shop.example.com/graphql/ smoke
    python run_presets.py https://shop.example.com/graphql/ million-shoppers --output report.json
    python run_presets.py https://shop.example.com/graphql/ flash-crowd --i-know-what-im-doing
"""

import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from checkout_load_test import (
    RunConfig,
    console_diagnostics,
    generate_report,
    print_banner,
    print_summary,
    run_load_test,
)

console = Console()

# =============================================================================
# PRESET CONFIGURATIONS
# =============================================================================

PRESETS = {
    # -------------------------------------------------------------------------
    # ITERATION PRESETS
    # -------------------------------------------------------------------------
    "smoke": {
        "name": "🌱 Smoke",
        "description": "One user, one iteration: verify catalog and checkout respond",
        "params": {
            "concurrency": 1,
            "iterations_per_worker": 1,
            "think_time_seconds": 0,
        }
    },
    "gentle": {
        "name": "🏃 Gentle",
        "description": "10 users x 5 iterations",
        "params": {
            "concurrency": 10,
            "iterations_per_worker": 5,
        }
    },
    "million-shoppers": {
        "name": "🛍️ Million Shoppers",
        "description": "1000 users x 5 iterations, 4h ceiling",
        "params": {
            "concurrency": 1000,
            "iterations_per_worker": 5,
            "max_duration_seconds": 4 * 60 * 60,
        }
    },

    # -------------------------------------------------------------------------
    # DURATION PRESETS
    # -------------------------------------------------------------------------
    "steady": {
        "name": "📈 Steady",
        "description": "50 users for 5 minutes",
        "params": {
            "concurrency": 50,
            "duration_seconds": 300,
        }
    },
    "soak": {
        "name": "🏃‍♀️ Soak",
        "description": "200 users for 30 minutes",
        "params": {
            "concurrency": 200,
            "duration_seconds": 1800,
            "max_duration_seconds": 3600,
        }
    },

    # -------------------------------------------------------------------------
    # EXTREME PRESETS (USE WITH CAUTION!)
    # -------------------------------------------------------------------------
    "flash-crowd": {
        "name": "☢️ Flash Crowd",
        "description": "5000 users checking out at once with no think time",
        "params": {
            "concurrency": 5000,
            "iterations_per_worker": 1,
            "think_time_seconds": 0,
        },
        "dangerous": True,
    },
}


def build_config(url: str, preset_name: str) -> RunConfig:
    return RunConfig(target_url=url, **PRESETS[preset_name]["params"])


def print_presets():
    """Print all available presets."""
    table = Table(title="Available Presets")
    table.add_column("Preset", style="cyan")
    table.add_column("Name")
    table.add_column("Description")

    for key, preset in PRESETS.items():
        danger_flag = "[red]⚠️ DANGEROUS[/red] " if preset.get("dangerous") else ""
        table.add_row(key, preset["name"], f"{danger_flag}{preset['description']}")

    console.print(table)


async def run_preset(url: str, preset_name: str, dangerous_confirmed: bool = False, output: str = None):
    """Run a preset scenario."""
    if preset_name not in PRESETS:
        console.print(f"[red]Unknown preset: {preset_name}[/red]")
        print_presets()
        return None

    preset = PRESETS[preset_name]

    # Safety check for dangerous presets
    if preset.get("dangerous") and not dangerous_confirmed:
        console.print(Panel(
            f"[bold red]⚠️  WARNING: {preset['name']} is DANGEROUS![/bold red]\n\n"
            f"{preset['description']}\n\n"
            f"This creates real checkouts and can overwhelm the target.\n\n"
            f"[yellow]Only use on systems you own or have permission to test![/yellow]",
            title="⚠️ Dangerous Preset",
            border_style="red"
        ))
        if not Confirm.ask("Do you want to proceed?"):
            console.print("[dim]Cancelled.[/dim]")
            return None

    config = build_config(url, preset_name)
    print_banner(config)

    counters = await run_load_test(config, diagnostics=console_diagnostics, show_live=True)
    print_summary(counters)

    if output:
        generate_report(counters, config, output)
    return counters


def main():
    if len(sys.argv) < 2 or sys.argv[1] in ["--help", "-h", "help"]:
        console.print("[bold]Usage:[/bold] python run_presets.py <URL> <PRESET> [--i-know-what-im-doing] [--output FILE]")
        print_presets()
        return

    if len(sys.argv) == 2:
        console.print("[red]Please provide both URL and preset name[/red]")
        print_presets()
        return

    url = sys.argv[1]
    preset = sys.argv[2]
    dangerous_confirmed = "--i-know-what-im-doing" in sys.argv

    output = None
    for i, arg in enumerate(sys.argv):
        if arg in ("--output", "-o") and i + 1 < len(sys.argv):
            output = sys.argv[i + 1]

    asyncio.run(run_preset(url, preset, dangerous_confirmed, output))


if __name__ == "__main__":
    main()
