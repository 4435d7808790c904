"""纯文本渲染

把查询结果和已保存单词列表渲染成命令行输出。
"""

from typing import List

from rhymer.helpers.grouping import Label
from rhymer.helpers.saved_words import SavedWords
from rhymer.helpers.utils import plural_suffix
from rhymer.services.word_service import LookupResult

NO_RESULTS = "(no results)"
LOOKUP_FAILED = "(lookup failed)"


def syllable_heading(label: Label) -> str:
    """分组标题，例如 "1 syllable:"、"3 syllables:" """
    if label is None:
        return "? syllables:"
    try:
        count = int(label)
    except (TypeError, ValueError):
        return f"{label} syllables:"
    return f"{label} syllable{plural_suffix(count)}:"


def _item_line(record) -> str:
    return f"  - {record.get('word', '')}"


def render_lookup(result: LookupResult) -> str:
    lines: List[str] = [result.title]

    if result.failed:
        lines.append(LOOKUP_FAILED)
    elif result.is_empty:
        lines.append(NO_RESULTS)
    elif result.groups is not None:
        for label, records in result.groups.items():
            lines.append(syllable_heading(label))
            lines.extend(_item_line(record) for record in records)
    else:
        lines.extend(_item_line(record) for record in result.records)

    return "\n".join(lines)


def render_saved(saved: SavedWords) -> str:
    return f"Saved words: {saved.render()}"
