"""Host runtime wiring the compiler and dispatcher to a display backend"""
