# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.


def format_minutes(seconds):
    mins = seconds // 60
    secs = seconds - (mins * 60)
    return '%d minutes and %d secs' % (mins, secs)


def str2int(v):
    try:
        return int(v)
    except ValueError:
        return v
