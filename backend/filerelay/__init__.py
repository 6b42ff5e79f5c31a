"""
File Relay

Registers files received through a chat intake channel and serves them
back over plain HTTP links by streaming from the origin provider.
"""
