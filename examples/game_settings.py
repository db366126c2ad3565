# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Game settings stored in a Configuration node.

Shows typed values sharing a name, adoption of an existing tree and
watch mode.
"""

import logging

from genro_conf import Color3, Conf, Vector3
from genro_conf.tree import Configuration, NumberValue

logging.basicConfig(level=logging.DEBUG)


def main():
    settings = Conf()
    settings.set('difficulty', 2)
    settings.set('difficulty', 'hard')
    settings.set('spawn', Vector3(0, 10, 0))
    settings.set('team_color', Color3.from_rgb(200, 40, 40))

    print(settings.get('difficulty', 'number'))   # 2
    print(settings.get('difficulty', 'string'))   # 'hard'
    print(settings.ensure('lives', 3))            # 3, no node created
    print([c.name for c in settings.root.get_children()])

    # Another Conf over the same tree sees the same values
    reloaded = Conf(settings.root)
    print(reloaded.get('spawn', 'Vector3'))

    # Watch mode: nodes added by someone else are picked up right away
    root = Configuration('server')
    with Conf(root, watch=True) as live:
        NumberValue('max_players', parent=root, value=16)
        print(live.get('max_players', 'number'))  # 16

    settings.delete('difficulty')
    print(settings.keys())


if __name__ == '__main__':
    main()
