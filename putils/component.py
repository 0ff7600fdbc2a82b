"""
Decorator to deal with the very annoying ComponentResource boilerplate.
"""

import pulumi


def component(namespace=None, outputs=()):
    """
    Makes the given callable a component, with much less boilerplate.

    If no namespace is given, uses the module and function names

    @component('pkg:MyResource', outputs=['thing'])
    def MyResource(self, name, ..., opts):
        ...
        return {...outputs}

    Only the names listed in outputs are registered with the engine; everything
    returned is still set as an attribute.
    """
    def _(func):
        nonlocal namespace
        if namespace is None:
            namespace = f"{func.__module__.replace('.', ':')}:{func.__name__}"

        def __init__(self, name, *pargs, opts=None, **kwargs):
            super(klass, self).__init__(namespace, name, None, opts)
            values = func(self, name, *pargs, opts=opts, **kwargs)
            if values is None:
                values = {}
            self.register_outputs({
                k: v for k, v in values.items() if k in outputs
            })
            vars(self).update(values)

        klass = type(func.__name__, (pulumi.ComponentResource,), {
            '__init__': __init__,
            '__doc__': func.__doc__,
            '__module__': func.__module__,
            '__qualname__': func.__qualname__,
            '__namespace__': namespace,
            '__outputs__': tuple(outputs),
        })
        return klass

    return _
