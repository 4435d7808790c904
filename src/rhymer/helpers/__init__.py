# Helpers package
from .grouping import group_by as group_by
from .grouping import group_by_field as group_by_field
from .utils import normalize_word as normalize_word
from .saved_words import SavedWords as SavedWords
