"""Client for controlling a daemon through named command and return pipes."""
