from django.contrib import admin

from rentals.models import AllowedDate, BookedInterval, RentalItem


class AllowedDateInline(admin.TabularInline):
    model = AllowedDate
    extra = 1


class BookedIntervalInline(admin.TabularInline):
    model = BookedInterval
    extra = 0
    readonly_fields = ["start_date", "end_date", "order_id", "owner_id", "created_at"]
    can_delete = False


@admin.register(RentalItem)
class RentalItemAdmin(admin.ModelAdmin):
    list_display = ["name", "is_listed", "created_at"]
    list_filter = ["is_listed"]
    search_fields = ["name"]
    inlines = [AllowedDateInline, BookedIntervalInline]


@admin.register(BookedInterval)
class BookedIntervalAdmin(admin.ModelAdmin):
    list_display = ["item", "start_date", "end_date", "order_id", "created_at"]
    list_filter = ["item"]
    search_fields = ["order_id"]
    readonly_fields = ["item", "start_date", "end_date", "order_id", "owner_id", "created_at"]
