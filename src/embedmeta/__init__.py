# ABOUTME: embedmeta - a normalized record for embeddable media metadata.
# ABOUTME: See embedmeta.media for the record and embedmeta.cli for the command line.
