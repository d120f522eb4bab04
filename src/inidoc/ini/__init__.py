# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 10:18:22
# @Author : Kariko Lin

from .model import Key, Section, Document
from .parser import IniParser
