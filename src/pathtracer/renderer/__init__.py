"""Light transport integrator, image rendering and output."""
