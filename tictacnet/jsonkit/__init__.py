"""JSON output helpers: shortest float text, ordered maps, byte containers and sinks."""