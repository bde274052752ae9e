"""Infrastructure: persistence codec, localization adapters, config, logging."""
