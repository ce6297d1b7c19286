"""Control script templates.

Templates use ``string.Template`` placeholders: ``$name``, ``$display_name``,
``$description`` and ``$path``. Literal shell dollars are written as ``$$``.
"""

from __future__ import annotations

import os
from string import Template
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svcctl.service.identity import ServiceIdentity

PLACEHOLDERS = ("name", "display_name", "description", "path")

UPSTART_TEMPLATE = """\
# $description

description     "$display_name"

start on filesystem or runlevel [2345]
stop on runlevel [!2345]

#setuid username

kill signal INT

respawn
respawn limit 10 5
umask 022

console none

pre-start script
    test -x $path || { stop; exit 0; }
end script

# Start
exec $path
"""

INIT_SCRIPT_TEMPLATE = """\
#!/bin/bash
#
# $name $display_name
#
# chkconfig: 2345 99 01
# description: $description
# processname: $name

source /etc/rc.d/init.d/functions

RETVAL=0

usage()
{
	echo $$"Usage: $$0 {start|stop|restart}" 1>&2
	RETVAL=2
}

restart()
{
	stop
	start
}

start() {
	echo -n $$"Starting $name ($path): "
	daemon $path
	RETVAL=$$?
	echo
}

stop() {
	echo -n $$"Shutting down $name ($path): "
	killproc $path
	RETVAL=$$?
	[ $$RETVAL -eq 0 ] && success || failure
	echo
	return $$RETVAL
}

case "$$1" in
    stop) stop ;;
    start|restart|reload|force-reload) restart ;;
    *) usage ;;
esac

exit $$RETVAL
"""


def render_script(template: str, identity: ServiceIdentity) -> str:
    """Fill a control script template from a service identity.

    Args:
        template: Template text with ``$``-placeholders.
        identity: Identity whose ``exec_path`` is already resolved.

    Returns:
        The control script content.

    Raises:
        ValueError: If the executable path is empty or relative.
        KeyError: If the template uses an unknown placeholder.
    """
    if not identity.exec_path or not os.path.isabs(identity.exec_path):
        raise ValueError(
            f"Executable path must be absolute, got {identity.exec_path!r}"
        )

    return Template(template).substitute(
        name=identity.name,
        display_name=identity.display_name,
        description=identity.description,
        path=identity.exec_path,
    )
