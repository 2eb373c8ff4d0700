"""appsubmit: turn app submission issues into apps.yaml pull requests.

See `appsubmit --help` for details.
"""
