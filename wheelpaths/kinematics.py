"""
Rigid-body wheel kinematics for the supported drivetrains.

Tank state (5 DOF):
    x = [v, omega, px, py, theta]
    - v: signed center speed along the heading
    - omega: angular velocity (rad/s)
    - px, py: center position
    - theta: heading angle (rad)

Swerve state (6 DOF):
    x = [vx, vy, omega, px, py, theta]
    - vx, vy: field-frame center velocity
    - omega, px, py, theta: as above

Robot frame: x forward, y left. Wheel order for swerve outputs is
FL, FR, BL, BR.
"""

import casadi as ca

from .trajectory import DrivetrainGeometry


def create_tank_kinematics_function(geometry: DrivetrainGeometry) -> ca.Function:
    """
    Create a CasADi function for the two sides of a differential drive.

    Returns:
        f_tank: CasADi Function (state) -> [x_l, y_l, v_l, x_r, y_r, v_r]
    """
    v = ca.MX.sym('v')
    omega = ca.MX.sym('omega')
    px = ca.MX.sym('px')
    py = ca.MX.sym('py')
    theta = ca.MX.sym('theta')

    state = ca.vertcat(v, omega, px, py, theta)

    half_w = geometry.wheelbase_width / 2

    # Sides sit perpendicular to the heading
    # left: +half_w along the robot y axis, right: -half_w
    x_l = px - half_w * ca.sin(theta)
    y_l = py + half_w * ca.cos(theta)
    x_r = px + half_w * ca.sin(theta)
    y_r = py - half_w * ca.cos(theta)

    # Turning left (omega > 0) slows the inside (left) side
    v_l = v - half_w * omega
    v_r = v + half_w * omega

    sides = ca.vertcat(x_l, y_l, v_l, x_r, y_r, v_r)

    return ca.Function('f_tank', [state], [sides])


def create_swerve_kinematics_function(geometry: DrivetrainGeometry) -> ca.Function:
    """
    Create a CasADi function for the four modules of a swerve drive.

    Each module position is the center plus the rotated corner offset r, and its
    velocity is v_center + omega x r.

    Returns:
        f_swerve: CasADi Function (state) -> [x, y, vx, vy] per module (16 rows)
    """
    vx = ca.MX.sym('vx')
    vy = ca.MX.sym('vy')
    omega = ca.MX.sym('omega')
    px = ca.MX.sym('px')
    py = ca.MX.sym('py')
    theta = ca.MX.sym('theta')

    state = ca.vertcat(vx, vy, omega, px, py, theta)

    half_l = geometry.wheelbase_length / 2
    half_w = geometry.wheelbase_width / 2

    # Corner offsets in the robot frame
    corners = [
        (half_l, half_w),    # FL
        (half_l, -half_w),   # FR
        (-half_l, half_w),   # BL
        (-half_l, -half_w),  # BR
    ]

    c = ca.cos(theta)
    s = ca.sin(theta)

    rows = []
    for cx, cy in corners:
        # Rotate offset into the field frame
        rx = cx * c - cy * s
        ry = cx * s + cy * c

        # omega x r for a planar rotation
        rows += [px + rx, py + ry, vx - omega * ry, vy + omega * rx]

    modules = ca.vertcat(*rows)

    return ca.Function('f_swerve', [state], [modules])
