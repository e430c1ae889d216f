"""grid_dodge
==========

A small falling-enemies dodge game on a fixed character grid.

The simulation core follows a functional layout: an immutable
:class:`grid_dodge.state.State` snapshot is advanced one tick at a time by the
pure reducer :func:`grid_dodge.step.step`, which chains a handful of systems
(player input, enemy fall, pruning, spawning). :class:`grid_dodge.world.World`
wraps the reducer in a mutable façade for interactive loops, and the renderer
package turns a state into a text frame or an image.
"""
