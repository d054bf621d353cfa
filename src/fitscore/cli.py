"""CLI for the fitscore fitness scoring engine."""

import logging

import click


def _echo_result(result) -> None:
    click.echo(f"\n{'=' * 60}")
    click.echo(f"  Fitness Score: {result.total_score}/100 "
               f"({result.fitness_level.value})")
    click.echo(f"{'=' * 60}")
    click.echo(f"  Cardiovascular: {result.cardiovascular_points:>2}/30 "
               f"({result.bonus_breakdown.cardiovascular_percent}%)")
    click.echo(f"  Recovery:       {result.recovery_points:>2}/35 "
               f"({result.bonus_breakdown.recovery_percent}%)")
    click.echo(f"  Activity:       {result.activity_points:>2}/30 "
               f"({result.bonus_breakdown.activity_percent}%)")
    click.echo(f"  Bonus:          {result.bonus_points:>2}/5")
    click.echo(f"{'-' * 60}")
    for item in result.history_items:
        click.echo(f"  [{item.category}] {item.metric}: "
                   f"{item.points}/{item.max_points}")
        click.echo(f"      {item.explanation}")
    click.echo(f"{'=' * 60}")


def _echo_average(average) -> None:
    click.echo(f"\n  Monthly average over {average.days} day(s): "
               f"{average.total_score:.1f}/100 ({average.fitness_level.value})")
    click.echo(f"    cardio {average.cardiovascular_points:.1f}, "
               f"recovery {average.recovery_points:.1f}, "
               f"activity {average.activity_points:.1f}, "
               f"bonus {average.bonus_points:.1f}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """fitscore -- explainable fitness scores from health metrics."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        )


@main.command()
@click.argument("file", type=click.Path(exists=True), required=False)
@click.option("--mock", is_flag=True, help="Score the built-in mock profile.")
@click.option("--output", "-o", default=None, help="Write the result JSON to file.")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
def score(file: str | None, mock: bool, output: str | None, as_json: bool) -> None:
    """Score a JSON metrics file."""
    from fitscore.loader import LoaderError, load_metrics
    from fitscore.scoring import calculate_fitness_score, get_mock_health_metrics

    if mock:
        metrics = get_mock_health_metrics()
    elif file is None:
        raise click.UsageError("Pass a metrics FILE or --mock.")
    else:
        try:
            metrics = load_metrics(file)
        except LoaderError as e:
            raise click.ClickException(str(e)) from e

    result = calculate_fitness_score(metrics)

    if as_json:
        click.echo(result.to_json())
    else:
        _echo_result(result)

    if output:
        with open(output, "w") as f:
            f.write(result.to_json())
        click.echo(f"\nResult written to {output}")


@main.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--output", "-o", default=None, help="Write daily scores and average as JSON.")
def history(file: str, output: str | None) -> None:
    """Score every day of a JSONL history file and average them."""
    import json

    from fitscore.loader import LoaderError, load_history
    from fitscore.scoring import (
        calculate_daily_based_monthly_average,
        calculate_daily_scores_from_historical_data,
    )

    try:
        days = load_history(file)
    except LoaderError as e:
        raise click.ClickException(str(e)) from e

    scores = calculate_daily_scores_from_historical_data(days)
    average = calculate_daily_based_monthly_average(days)

    for day, result in zip(days, scores):
        click.echo(f"  {day.date.isoformat()}  {result.total_score:>3}/100  "
                   f"{result.fitness_level.value}")
    _echo_average(average)

    if output:
        payload = {
            "days": [
                {"date": day.date.isoformat(), **result.to_dict()}
                for day, result in zip(days, scores)
            ],
            "monthly_average": average.to_dict(),
        }
        with open(output, "w") as f:
            json.dump(payload, f, indent=2)
        click.echo(f"\nHistory written to {output}")


@main.command()
@click.option("--days", "-d", default=30, help="Number of days to generate.")
@click.option("--seed", "-s", default=None, type=int, help="Random seed.")
def sample(days: int, seed: int | None) -> None:
    """Print synthetic daily score history."""
    from fitscore.scoring import (
        calculate_monthly_average_from_daily_scores,
        generate_sample_history_data,
    )

    entries = generate_sample_history_data(days=days, seed=seed)
    for entry in entries:
        click.echo(f"  {entry.date.isoformat()}  {entry.result.total_score:>3}/100  "
                   f"{entry.result.fitness_level.value}")
    _echo_average(
        calculate_monthly_average_from_daily_scores([e.result for e in entries])
    )


if __name__ == "__main__":
    main()
