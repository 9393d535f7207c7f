"""ACPI battery structures and the control device of FreeBSD and DragonFly BSD."""