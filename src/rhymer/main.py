"""Rhymer 主程序

查询押韵词、同义词并管理已保存单词的命令行工具。
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from rhymer.app import configure, container
from rhymer.downloader.types import RelationType
from rhymer.helpers.utils import normalize_word, setup_logging
from rhymer.render import render_lookup, render_saved

logger = logging.getLogger(__name__)

app = typer.Typer(help="Rhymer 押韵词/同义词查询工具")


@app.callback()
def main_callback(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="配置文件路径，默认使用当前目录下的 config.toml"
    ),
):
    if config is not None:
        try:
            configure(config)
        except (FileNotFoundError, ValueError) as e:
            typer.echo(f"❌ {e}", err=True)
            raise typer.Exit(code=1)


def _load_saved_words():
    saved = container.saved_words()
    try:
        saved.load()
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)
    return saved


def _run_lookup(word: str, relation: str, save: Optional[List[str]], debug: bool):
    setup_logging("lookup", "debug" if debug else "info")

    word_service = container.word_service()
    try:
        result = word_service.lookup(word, relation)
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render_lookup(result))
    if result.failed:
        raise typer.Exit(code=1)

    if save:
        saved = _load_saved_words()
        found = set(result.words)
        for candidate in save:
            candidate = normalize_word(candidate)
            if candidate not in found:
                typer.echo(f"⚠️ '{candidate}' 不在查询结果中，未保存")
                continue
            saved.add(candidate)
        saved.save()
        typer.echo(render_saved(saved))


@app.command()
def rhymes(
    word: str = typer.Argument(..., help="要查询的单词"),
    save: Optional[List[str]] = typer.Option(
        None, "--save", "-s", help="保存结果中的单词，可重复指定"
    ),
    debug: bool = typer.Option(False, "--debug", help="启用调试模式，输出详细日志"),
):
    """查询押韵词，按音节数分组显示"""
    _run_lookup(word, RelationType.rhymes, save, debug)


@app.command()
def synonyms(
    word: str = typer.Argument(..., help="要查询的单词"),
    save: Optional[List[str]] = typer.Option(
        None, "--save", "-s", help="保存结果中的单词，可重复指定"
    ),
    debug: bool = typer.Option(False, "--debug", help="启用调试模式，输出详细日志"),
):
    """查询同义词"""
    _run_lookup(word, RelationType.synonyms, save, debug)


@app.command()
def lookup(
    word: str = typer.Argument(..., help="要查询的单词"),
    relation: str = typer.Option(
        RelationType.rhymes,
        "--relation",
        "-r",
        help=f"关系类型: {', '.join(RelationType.get_all_relations())}",
    ),
    save: Optional[List[str]] = typer.Option(
        None, "--save", "-s", help="保存结果中的单词，可重复指定"
    ),
    debug: bool = typer.Option(False, "--debug", help="启用调试模式，输出详细日志"),
):
    """按指定关系类型查询"""
    if not RelationType.is_valid_relation(relation):
        typer.echo(f"❌ 不支持的关系类型: {relation}", err=True)
        raise typer.Exit(code=1)
    _run_lookup(word, relation, save, debug)


@app.command()
def save(words: List[str] = typer.Argument(..., help="要保存的单词")):
    """直接保存单词"""
    saved = _load_saved_words()
    for word in words:
        word = normalize_word(word)
        if word:
            saved.add(word)
    saved.save()
    typer.echo(render_saved(saved))


@app.command()
def saved(clear: bool = typer.Option(False, "--clear", help="清空已保存单词")):
    """显示已保存单词"""
    saved_words = _load_saved_words()
    if clear:
        saved_words.clear()
        saved_words.save()
    typer.echo(render_saved(saved_words))


def main():
    """主函数"""
    app()


if __name__ == "__main__":
    main()
