"""CLI 入口"""

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from .config import load_settings
from .models.review_result import ReviewResult, ReviewSuccess
from .reviewer import CodeReviewer

PROG_NAME = "ai-file-reviewer"


def print_usage():
    """打印用法说明"""
    click.echo(f"Usage: {PROG_NAME} <filename>")
    click.echo(f"Example: {PROG_NAME} ./test.js")


def print_review_result(result: ReviewSuccess):
    """打印评审结果

    Args:
        result: 成功的评审结果
    """
    separator = "=" * 60
    click.echo(f"Code Review results for {result.file_name}")
    click.echo(f"Language:  {result.language.value}")
    click.echo(f"Reviewed at:  {result.timestamp.isoformat()}")
    click.echo("\n" + separator)
    click.echo(result.analysis)
    click.echo(separator)


@click.command(
    context_settings={"help_option_names": [], "ignore_unknown_options": True}
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args: tuple[str, ...]):
    """AI File Reviewer - 基于 LangChain 的单文件代码评审工具"""
    # 参数必须恰好一个；否则不访问文件也不调用网络
    if len(args) != 1 or not args[0]:
        print_usage()
        sys.exit(1)

    file_name = args[0]

    if not Path(file_name).exists():
        click.echo(click.style(f"File not found: {file_name}", fg="red"))
        sys.exit(1)

    click.echo(f"Reviewing {file_name}...")

    reviewer = CodeReviewer(settings=load_settings())
    result: ReviewResult = reviewer.review_file(file_name)

    if not result.ok:
        click.echo(
            click.style(f"Error reviewing {file_name}: {result.error}", fg="red")
        )
        sys.exit(1)

    print_review_result(result)
    sys.exit(0)


def main():
    """主入口点"""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
