"""Command-line interface for the training periodization tool."""

import logging
import sys
from datetime import date
from typing import Any, Dict, List

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from .config import config
from .db import get_db, MacroCycleStore
from .planning import (
    InvalidPlanRequest,
    MacroCycleBuilder,
    PlanCreationFailure,
    PeriodizationType,
    TrainingGoal,
    TrainingLevel,
)

console = Console()

GOAL_CHOICES = [goal.value for goal in TrainingGoal]
LEVEL_CHOICES = [level.value for level in TrainingLevel]
PERIODIZATION_CHOICES = [style.value for style in PeriodizationType]


def _escape(text: Any) -> str:
    return str(text).replace('[', r'\[').replace(']', r'\]')


def render_plan(record: Dict[str, Any], show_weeks: bool = False) -> None:
    """Render a macrocycle record (as produced by MacroCycle.to_record)."""
    deload = record.get('deload_schedule') or {}
    console.print(Panel.fit(
        f"[bold]{_escape(record['name'])}[/bold]\n"
        f"{_escape(record['description'])}\n"
        f"📅 {record['start_date'][:10]} → {record['end_date'][:10]}  "
        f"| {record['training_frequency']} days/week  "
        f"| {record['periodization_type']} periodization\n"
        f"🔄 Deload every {deload.get('frequency')} weeks "
        f"({deload.get('strategy')}, {deload.get('timing')})",
        title=f"Plan {record['id']}",
        style="bold blue",
    ))

    table = Table(title="Mesocycles", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Phase", style="cyan")
    table.add_column("Start")
    table.add_column("Weeks", justify="right")
    table.add_column("Volume", justify="center")
    table.add_column("Intensity", justify="center")
    table.add_column("Deload", justify="center")
    table.add_column("Progression")

    for number, meso in enumerate(record.get('meso_cycles') or [], start=1):
        table.add_row(
            str(number),
            meso['name'],
            meso['start_date'][:10],
            str(meso['duration']),
            meso['volume_progression'],
            meso['intensity_progression'],
            "✅" if meso['includes_deload'] else "",
            meso['progression_model'],
        )
    console.print(table)

    if show_weeks:
        _render_weeks(record.get('meso_cycles') or [])

    phases = (record.get('nutrition_periodization') or {}).get('phases') or []
    if phases:
        nutrition = Table(title="Nutrition Periodization", box=box.ROUNDED)
        nutrition.add_column("Phase", style="green")
        nutrition.add_column("Weeks", justify="right")
        nutrition.add_column("Calories")
        nutrition.add_column("Protein (g/kg)", justify="right")
        nutrition.add_column("Carbs")
        nutrition.add_column("Fats")
        for phase in phases:
            nutrition.add_row(
                phase['phase'],
                str(phase['duration']),
                phase['calorie_adjustment'],
                f"{phase['protein_target']:.1f}",
                phase['carb_strategy'],
                phase['fat_strategy'],
            )
        console.print(nutrition)


def _render_weeks(meso_cycles: List[Dict[str, Any]]) -> None:
    table = Table(title="Microcycles", box=box.SIMPLE)
    table.add_column("Phase", style="cyan")
    table.add_column("Week")
    table.add_column("Start")
    table.add_column("Vol", justify="right")
    table.add_column("Int", justify="right")
    table.add_column("RIR", justify="right")
    table.add_column("Days", justify="right")
    table.add_column("Fatigue", justify="right")
    table.add_column("Readiness", justify="right")

    for meso in meso_cycles:
        for week in meso['micro_cycles']:
            style = "yellow" if week['is_deload'] else None
            fatigue = week['fatigue_management']
            table.add_row(
                meso['phase'],
                week['name'],
                week['start_date'][:10],
                f"{week['volume']:.1f}",
                f"{week['intensity']:.1f}",
                f"{week['target_rir']:.1f}",
                str(week['frequency']),
                f"{fatigue['expected_fatigue']:.0f}",
                f"{fatigue['readiness_threshold']:.0f}",
                style=style,
            )
    console.print(table)


@click.group()
@click.option("--database-url", default=None, help="Database URL (defaults to DATABASE_URL)")
@click.pass_context
def cli(ctx, database_url):
    """Periodized training plan generator."""
    ctx.ensure_object(dict)
    ctx.obj["database_url"] = database_url or config.DATABASE_URL


@cli.command()
@click.pass_obj
def init_db(obj):
    """Create the database tables."""
    get_db(obj["database_url"])
    console.print(f"[green]✅ Database ready at {_escape(obj['database_url'])}[/green]")


@cli.command()
@click.option("--user-id", required=True, help="Owner of the plan")
@click.option("--name", required=True, help="Plan name")
@click.option("--goal", type=click.Choice(GOAL_CHOICES), default="hypertrophy", help="Primary goal")
@click.option("--level", type=click.Choice(LEVEL_CHOICES), default="intermediate", help="Training level")
@click.option("--frequency", type=click.IntRange(1, 7), default=config.DEFAULT_TRAINING_FREQUENCY,
              help="Training days per week")
@click.option("--months", type=click.IntRange(1, 24), default=config.DEFAULT_DURATION_MONTHS,
              help="Program duration in months")
@click.option("--start-date", default=None, help="Start date (YYYY-MM-DD), defaults to today")
@click.option("--periodization", type=click.Choice(PERIODIZATION_CHOICES),
              default=config.DEFAULT_PERIODIZATION_TYPE, help="Periodization style")
@click.option("--secondary-goal", "secondary_goals", multiple=True, type=click.Choice(GOAL_CHOICES),
              help="Secondary goal (repeatable)")
@click.option("--target-muscle", "target_muscles", multiple=True, help="Prioritized muscle group (repeatable)")
@click.option("--nutrition/--no-nutrition", default=config.INCLUDE_NUTRITION_PERIODIZATION,
              help="Include nutrition periodization")
@click.option("--dry-run", is_flag=True, help="Build the plan without saving it")
@click.option("--weeks", "show_weeks", is_flag=True, help="Also list every microcycle")
@click.pass_obj
def create_plan(obj, user_id, name, goal, level, frequency, months, start_date, periodization,
                secondary_goals, target_muscles, nutrition, dry_run, show_weeks):
    """Generate a periodized macrocycle."""
    console.print(Panel.fit(f"🏋️  Creating {months}-month {goal} plan", style="bold green"))

    builder = MacroCycleBuilder(
        store=None if dry_run else MacroCycleStore(database_url=obj["database_url"])
    )
    arguments = dict(
        user_id=user_id,
        name=name,
        primary_goal=goal,
        training_level=level,
        frequency=frequency,
        duration_months=months,
        start_date=start_date or date.today().isoformat(),
        secondary_goals=secondary_goals,
        periodization_type=periodization,
        target_muscle_groups=target_muscles,
        include_nutrition_periodization=nutrition,
    )

    try:
        if dry_run:
            result = builder.build(**arguments)
        else:
            result = builder.create_macro_cycle(**arguments)
    except InvalidPlanRequest as e:
        console.print(f"[red]❌ Invalid plan request: {_escape(e)}[/red]")
        sys.exit(2)

    if isinstance(result, PlanCreationFailure):
        console.print(f"[red]❌ Could not save plan: {_escape(result.cause)}[/red]")
        sys.exit(1)

    render_plan(result.to_record(), show_weeks=show_weeks)
    if dry_run:
        console.print("[orange1]Dry run - plan not saved.[/orange1]")
    else:
        console.print(f"[green]✅ Plan saved with id {result.id}[/green]")


@cli.command()
@click.argument("plan_id")
@click.option("--weeks", "show_weeks", is_flag=True, help="Also list every microcycle")
@click.pass_obj
def show_plan(obj, plan_id, show_weeks):
    """Show a saved plan."""
    record = MacroCycleStore(database_url=obj["database_url"]).load(plan_id)
    if record is None:
        console.print(f"[red]❌ No plan found with id {_escape(plan_id)}[/red]")
        sys.exit(1)
    render_plan(record, show_weeks=show_weeks)


@cli.command()
@click.option("--user-id", required=True, help="Owner of the plans")
@click.option("--active-only", is_flag=True, help="Only list active plans")
@click.pass_obj
def list_plans(obj, user_id, active_only):
    """List saved plans for a user."""
    records = MacroCycleStore(database_url=obj["database_url"]).list_for_user(user_id, active_only=active_only)
    if not records:
        console.print(f"[orange1]No plans found for {_escape(user_id)}[/orange1]")
        return

    table = Table(title=f"Plans for {_escape(user_id)}", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Goal")
    table.add_column("Level")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Active", justify="center")
    for record in records:
        table.add_row(
            record['id'],
            record['name'],
            record['primary_goal'],
            record['training_level'],
            record['start_date'][:10],
            record['end_date'][:10],
            "✅" if record['is_active'] else "",
        )
    console.print(table)


def main():
    """Main entry point."""
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    try:
        config.validate()
        cli()
    except KeyboardInterrupt:
        console.print("\n[orange1]Operation cancelled by user.[/orange1]")
    except ValueError as e:
        console.print(f"[red]❌ Configuration Error: {_escape(e)}[/red]")
        sys.exit(2)


if __name__ == "__main__":
    main()
