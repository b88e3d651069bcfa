"""Folder classifier.

Maps one candidate folder to exactly one label by resolving its
comparison name and running the ordered rule list against the
installed-software index.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from orphyctl.classifier.aliases import DEFAULT_ALIASES, resolve_name
from orphyctl.classifier.index import InstalledSoftwareIndex
from orphyctl.classifier.rules import DEFAULT_RULES, MatchRule
from orphyctl.models.folder import ClassifiedFolder, Label

logger = logging.getLogger(__name__)


class Classifier:
    """Classifies candidate folders against an installed-software index.

    The index, alias table and rules are fixed at construction and only
    read afterwards, so one classifier serves a whole run.

    Example:
        >>> index = InstalledSoftwareIndex.from_names(packages=["htop"])
        >>> classifier = Classifier(index, aliases={})
        >>> classifier.classify("/home/me/.config/htop").label
        <Label.PACKAGE_MATCH: 'installed-package-match'>
    """

    def __init__(
        self,
        index: InstalledSoftwareIndex,
        aliases: Mapping[str, str] = DEFAULT_ALIASES,
        rules: Sequence[MatchRule] = DEFAULT_RULES,
    ) -> None:
        self._index = index
        self._aliases = aliases
        self._rules = tuple(rules)

    def comparison_name(self, basename: str) -> str:
        """Return the name a folder basename is matched with."""
        return resolve_name(basename, self._aliases)

    def label_for(self, name: str) -> Label:
        """Run the rule list for a comparison name.

        Args:
            name: Resolved comparison name.

        Returns:
            Label of the first matching rule, or ``Label.ORPHANED``.
        """
        for rule in self._rules:
            if rule.matches(name, self._index):
                return rule.label
        return Label.ORPHANED

    def classify(self, path: str) -> ClassifiedFolder:
        """Classify one folder.

        Args:
            path: Absolute path to the candidate folder.

        Returns:
            ClassifiedFolder carrying the single assigned label.
        """
        name = self.comparison_name(Path(path).name)
        label = self.label_for(name)
        logger.debug("Classified %s as %s (name=%r)", path, label.value, name)
        return ClassifiedFolder(path=path, name=name, label=label)


def classify(
    folder: str,
    index: InstalledSoftwareIndex,
    aliases: Mapping[str, str] = DEFAULT_ALIASES,
) -> Label:
    """Classify a single folder path and return its label."""
    return Classifier(index, aliases).classify(folder).label
