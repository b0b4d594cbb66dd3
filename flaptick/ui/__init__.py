"""pygame front-end for flaptick."""
