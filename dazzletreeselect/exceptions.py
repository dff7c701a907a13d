"""Exception and warning types for DazzleTreeSelect.

The engine itself has no fatal conditions: unknown identifiers, empty trees
and empty selections are all valid inputs. The types here cover the two
things that can still go wrong around it - a configuration that cannot be
satisfied, and a tree that breaks the unique-identifier contract.
"""


class SelectorConfigError(ValueError):
    """Raised when a selector configuration is inconsistent.

    Typical causes are contradictory legacy mode flags (``top_level_only``
    and ``include_children`` both given with the same value) or an unknown
    mode name.
    """
    pass


class DuplicateIdWarning(UserWarning):
    """Development-time signal that a tree reuses a node identifier.

    Emitted at most once per identifier per tree reference. The first node
    seen with the identifier is the one the index keeps; engine output is
    never altered by the warning.
    """
    pass
