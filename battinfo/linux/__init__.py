"""Reading battery data from Linux sysfs power-supply directories."""