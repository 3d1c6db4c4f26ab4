#!/usr/bin/env python3
"""
Example 01: Angular Velocity From Rotation Rates

Demonstrates fundamental rotdiff usage:
- Building rotations and rates in several parameterizations
- Converting rates to body angular velocity and back
- Keeping ACTIVE and PASSIVE objects apart
- Plotting angular velocity histories

Outputs saved to: examples/outputs/
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

import rotdiff as rd
from rotdiff.rotation_diffs import diff_type_for
from rotdiff.utils import quat_multiply, rotvec_to_quat
from rotdiff.visualization import plot_angular_velocity, plot_angular_velocity_comparison

# Output directory
OUTPUT_DIR = Path(__file__).parent / "outputs"

FAMILIES = {
    "quaternion": rd.RotationQuaternion,
    "matrix": rd.RotationMatrix,
    "angle-axis": rd.AngleAxis,
    "rotation vector": rd.RotationVector,
    "euler zyx": rd.EulerAnglesZyx,
    "euler xyz": rd.EulerAnglesXyz,
}


def single_conversion_example():
    """One rotation, one rate, one angular velocity."""
    print("=" * 60)
    print("Single Conversion")
    print("=" * 60)

    # 30° yaw, spinning up in pitch
    rotation = rd.EulerAnglesZyxActive(yaw=np.deg2rad(30), pitch=0.0, roll=0.0)
    rate = rd.EulerAnglesZyxDiffActive(yaw=0.0, pitch=0.5, roll=0.0)

    omega = rd.to_local_angular_velocity(rotation, rate)
    print(f"Rotation: {rotation!r}")
    print(f"Rate:     {rate!r}")
    print(f"Body angular velocity: {omega}")
    print(f"Inertial angular velocity: {omega.to_global(rotation)}")

    # Reverse mapping
    back = rd.to_rotation_diff(rotation, omega)
    print(f"Recovered rate: {back}")

    # Mixing usages does not resolve
    try:
        rd.to_local_angular_velocity(rotation.as_passive(), rate)
    except TypeError as err:
        print(f"Usage mismatch rejected: {err}")


def tumbling_body_example():
    """Constant body rate sampled in every parameterization."""
    print("=" * 60)
    print("Tumbling Body")
    print("=" * 60)

    omega0 = np.array([0.4, -0.2, 0.9])
    q0 = rd.EulerAnglesZyxActive(yaw=0.3, pitch=0.2, roll=0.1).to_quaternion().to_array()
    t = np.linspace(0.0, 2.0, 201)
    dt = t[1] - t[0]

    # Exact attitude history of the constant-rate motion
    quaternions = [rd.RotationQuaternionActive.from_array(quat_multiply(q0, rotvec_to_quat(omega0 * ti))) for ti in t]

    histories = {}
    for name, family in FAMILIES.items():
        rotations = [q.convert_to(family) for q in quaternions]
        arrays = np.array([r.to_array() for r in rotations])
        rates = np.gradient(arrays, dt, axis=0)
        omegas = [
            rd.to_local_angular_velocity(r, diff_type_for(type(r)).from_array(dr))
            for r, dr in zip(rotations, rates)
        ]
        histories[name] = omegas
        error = max(np.linalg.norm(w.vector - omega0) for w in omegas[1:-1])
        print(f"{name:16s} max error vs ω0: {error:.2e}")

    fig, _ = plot_angular_velocity(t, histories["quaternion"], title="Tumbling Body (quaternion)", show_norm=True)
    fig.savefig(OUTPUT_DIR / "01a_tumbling_body.png", dpi=150)
    print("Saved: 01a_tumbling_body.png")

    fig2, _ = plot_angular_velocity_comparison(t, histories, reference="quaternion")
    fig2.savefig(OUTPUT_DIR / "01b_parameterization_comparison.png", dpi=150)
    print("Saved: 01b_parameterization_comparison.png")

    plt.close("all")


def main():
    print("#" * 60)
    print("# rotdiff Example 01: Angular Velocity")
    print("#" * 60)

    # Create output directory
    OUTPUT_DIR.mkdir(exist_ok=True)
    print(f"\nOutputs: {OUTPUT_DIR.absolute()}\n")

    single_conversion_example()
    tumbling_body_example()

    print("\n" + "=" * 60)
    print(f"Done! Check {OUTPUT_DIR.name}/ for outputs.")
    print("=" * 60)


if __name__ == "__main__":
    main()
