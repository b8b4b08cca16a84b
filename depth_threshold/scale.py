from depth_threshold.errors import NoDepthSensorError, StartupError


def get_depth_scale(device) -> float:
    """
    Meters per raw depth unit of the device's depth sensor.

    device: anything with ``query_sensors()`` (rs.device or a fake).
    The first sensor that reports ``is_depth_sensor()`` wins.
    """
    for sensor in device.query_sensors():
        if not sensor.is_depth_sensor():
            continue

        scale = float(sensor.as_depth_sensor().get_depth_scale())
        if scale <= 0.0:
            raise StartupError(f"Depth sensor reported a non-positive depth scale: {scale}")
        return scale

    raise NoDepthSensorError("Device does not have a depth sensor")
