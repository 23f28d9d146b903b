"""HTTP and other delivery interfaces."""
