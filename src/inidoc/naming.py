# -*- encoding: utf-8 -*-
# @File   : naming.py
# @Time   : 2026/10/18 10:02:41
# @Author : Kariko Lin

"""Identifier rule shared by section and key names."""


def is_valid(name: object) -> bool:
    """`name` starts with a letter or `_`,
    and the rest are letters, digits or `_`.

    Unicode letters and digits count as well (`str.isalpha`, `str.isalnum`).
    """
    if not isinstance(name, str) or not name:
        return False
    if not (name[0].isalpha() or name[0] == '_'):
        return False
    for i in name[1:]:
        if not (i.isalnum() or i == '_'):
            return False
    return True
