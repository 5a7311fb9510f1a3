from django.contrib.auth.decorators import user_passes_test


def is_front_desk_user(user):
    # role table lives on website.User; anonymous users have no role
    check = getattr(user, "is_front_desk_user", None)
    return bool(check and check())


front_desk_required = user_passes_test(is_front_desk_user)
